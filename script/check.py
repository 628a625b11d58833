import os
import subprocess
import sys

source_dirs = "httprange tests"
python = sys.executable
subprocess.check_call(f"{python} -m isort --check --diff {source_dirs}", shell=True)
subprocess.check_call(f"{python} -m black --check --diff {source_dirs}", shell=True)
subprocess.check_call(f"{python} -m flake8 --ignore W503,E203,E501,E731 {source_dirs}", shell=True)
subprocess.check_call(f"{python} -m mypy {source_dirs}", shell=True)

# Run the suite against the mypyc build too, then drop the extension modules.
subprocess.check_call(f"{python} setup.py build_ext --inplace", shell=True)
try:
    subprocess.check_call(f"{python} -m pytest tests", shell=True)
finally:
    for name in os.listdir("httprange"):
        if name.endswith((".so", ".pyd")):
            os.remove(os.path.join("httprange", name))
