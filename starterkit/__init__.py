"""Express.js starter-kit scaffolding package.

This package is the root of the ``create-expressjs-starterkit`` command line
tool. The tool asks which starter kit to generate, what the project should be
called and which package manager to use, then clones the starter-kit
repository, installs its dependencies and strips the cloned ``.git``
directory.

Package Structure
-----------------
- `setup/`:
    Interactive flow: environment checks, prompts, directory creation, the
    setup orchestrator and the injected process capability.
- `config.py`: All configuration constants, as UPPER_SNAKE_CASE.
- `exceptions.py`: The application error taxonomy.
- `models.py`: Closed enumerations and immutable value objects.

Examples
--------
>>> import starterkit
>>> starterkit.__version__
'0.1.0'

"""

__all__ = ["__version__"]
__version__ = "0.1.0"
