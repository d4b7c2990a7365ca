# setup.py
from setuptools import find_namespace_packages, setup

setup(
    name="model-hierarchy",
    version="1.0.0",
    description="Aggregation layer for browsing remote hub/project/folder and component hierarchies",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["modelhierarchy", "modelhierarchy.*"]),
    python_requires=">=3.8",
    install_requires=[
        "requests",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'modelhierarchy=modelhierarchy.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
