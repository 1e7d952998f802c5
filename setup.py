import os
from setuptools import find_packages, setup

with open("README.md") as readme_file:
    readme = readme_file.read()

this = os.path.dirname(os.path.realpath(__file__))


def read(name):
    with open(os.path.join(this, name)) as f:
        return f.read()

VERSION = "0.1.7"


setup(
    name="ppdctl",
    version=VERSION,
    description="Command-line client for power-profiles-daemon",
    long_description=readme,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=read("requirements.txt").splitlines(),
    extras_require={"test": ["pytest"]},
    python_requires=">=3.8",
    include_package_data=True,
    zip_safe=True,
    license="MIT",
    keywords="linux power profiles power-profiles-daemon dbus cli",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: System Administrators",
        "Operating System :: POSIX :: Linux",
        "Environment :: Console",
        "Natural Language :: English",
    ],
    entry_points={
        "console_scripts": ["ppdctl=ppdctl.bin.ppdctl:main"],
    },
)
