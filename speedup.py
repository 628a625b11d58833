import os
from pathlib import Path

if os.environ.get("WITHOUT_MYPYC", "False") != "False":

    def build(setup_kwargs):
        pass

else:

    def build(setup_kwargs):
        try:
            from mypyc.build import mypycify
        except ImportError:
            print("Error in import mypyc.build, skip build.", flush=True)
            return

        modules = list(
            filter(
                lambda path: path.replace("\\", "/")
                not in (
                    "httprange/__init__.py",
                    "httprange/__version__.py",
                    "httprange/datastructures.py",
                ),
                map(str, Path("httprange").glob("*.py")),
            )
        )
        setup_kwargs.update(
            {
                "ext_modules": mypycify(["--ignore-missing-imports", *modules]),
            }
        )
