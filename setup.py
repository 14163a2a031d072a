# setup.py
from setuptools import setup, find_packages

setup(
    name="shellkit",
    version="0.1.0",
    description="Minimal Unix-style utilities (echo, cat, ls, tree, grep) behind a single dispatcher",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={"shellkit": ["interface/locales/*.json"]},
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        'console_scripts': [
            'shellkit=shellkit.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
)
