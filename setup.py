import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="steamfolders",
    version="0.1.0",
    author="steamfolders contributors",
    description="Terminal list of Steam games and Wine-prefixed shortcuts that opens their folders",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages("src"),
    package_dir={"": "src"},
    classifiers=[
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU Affero General Public License v3 or later (AGPLv3+)",
        "Topic :: Games/Entertainment",
        "Environment :: Console :: Curses",
    ],
    install_requires=["vdf>=3,<4", "appdirs"],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["steamfolders=steamfolders.cli:main"]},
    python_requires=">=3.9",
)
