# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="sql-merge",
    version="0.1.0",
    description="Merge the SQL scripts of a directory into a single file in natural order",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["sqlmerge", "sqlmerge.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'sql-merge=sqlmerge.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
