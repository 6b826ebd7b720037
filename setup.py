# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="treeshell",
    version="0.1.0",
    description="Interactive shell to inspect and edit an in-memory snapshot of a directory tree",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["treeshell*"]),
    package_data={
        "treeshell.interface.locales": ["*.json"],
    },
    include_package_data=True,
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'treeshell=treeshell.interface.cli.app:run',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
)
