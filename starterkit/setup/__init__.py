"""Interactive setup flow for the starter-kit scaffolder.

Submodules are imported directly (``from starterkit.setup import project``);
this package initializer stays empty so leaf modules such as ``i18n`` can be
imported without pulling in the console or prompt stack.
"""
