import importlib

MODULES = [
    'grawlix',
    'grawlix.config',
    'grawlix.core',
    'grawlix.errors',
    'grawlix.filters',
    'grawlix.generator',
    'grawlix.logsetup',
    'grawlix.patterns',
    'grawlix.plugin',
    'grawlix.styles',
    'grawlix.util',
]

def test_all_modules_importable():
    for name in MODULES:
        importlib.import_module(name)
