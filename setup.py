# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="inlining-log",
    version="0.1.0",
    description="Decision log and call-site reports for compiler inlining",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["inlining_log*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
