# setup.py
from setuptools import setup, find_packages

setup(
  name="subdir_order",
  version="0.1.0",
  packages=find_packages(where="src"),
  package_dir={"":"src"},
  python_requires=">=3.11",
  install_requires=["click", "pydantic>=2"],
  extras_require={"test": ["pytest"]},
  entry_points={
    "console_scripts": [
      "subdir-order = subdir_order.cli:main"
    ]
  }
)
