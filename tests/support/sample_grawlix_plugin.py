"""Plugin module loaded by dotted name in the tests."""

import regex

from grawlix import GrawlixPlugin


def _init(self, options):
    options["inits"] = options.get("inits", 0) + 1
    options["seen_name"] = self.name


def setup(plugin_options, options):
    plugin_options["factory_runs"] = plugin_options.get("factory_runs", 0) + 1
    return GrawlixPlugin(
        name="sample-grawlix-plugin",
        filters=[{"word": "crap", "pattern": regex.compile(r"\bcrap\b", regex.IGNORECASE)}],
        styles=[{"name": "rook", "char": "♜"}],
        init=_init,
    )
