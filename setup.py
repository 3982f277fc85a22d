import re

import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

# read the version without importing the package (tinytuya may not be installed yet)
with open("tinyrobovac/core/core.py", "r") as fh:
    version_tuple = re.search(r"^version_tuple = \((\d+), (\d+), (\d+)\)", fh.read(), re.M).groups()
__version__ = ".".join(version_tuple)

INSTALL_REQUIRES = [
    'tinytuya>=1.13',  # Tuya local protocol client - discovery, encryption and framing
    'colorama',      # Makes ANSI escape character sequences work under MS Windows.
]

setuptools.setup(
    name="tinyrobovac",
    version=__version__,
    description="Python module to control Tuya based robot vacuums over the local network",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=("tests",)),
    python_requires=">=3.7",
    install_requires=INSTALL_REQUIRES,
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["tinyrobovac=tinyrobovac.__main__:main"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
