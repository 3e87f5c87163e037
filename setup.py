# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="devicespace",
    version="0.1.0",
    description="Rebuild a drive's directory tree from a terminal transcript and report directory sizes",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["devicespace*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'devicespace=devicespace.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
