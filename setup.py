# setup.py
import os
import re

import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

PKG = "qtrans"
VERSIONFILE = os.path.join(PKG, "_version.py")
verstrline = open(VERSIONFILE, "rt").read()
VSRE = r"^__version__ = ['\"]([^'\"]*)['\"]"
mo = re.search(VSRE, verstrline, re.M)
if mo:
    VERSION = mo.group(1)
else:
    raise RuntimeError("Unable to find version string in %s." % (VERSIONFILE,))

setuptools.setup(
    name="qtrans",
    version=VERSION,
    author="Kerry He, James Saunderson, and Hamza Fawzi",
    description="Partial transposes of dense and sparse multipartite quantum operators",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    packages=setuptools.find_packages(include=["qtrans", "qtrans.*"]),
    python_requires=">=3.8",
    install_requires=["numpy", "scipy", "numba"],
    extras_require={
        "gpu": ["cupy"],
        "test": ["pytest"],
    },
    package_data={"": ["README.md", "LICENSE.md"]},
)
