# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="scriptfmt",
    version="1.0.0",
    description="Beautifier and minifier for script source text that never touches string, pattern or comment literals",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["scriptfmt", "scriptfmt.*"]),
    package_data={
        "scriptfmt.interface.locales": ["*.json"],
    },
    install_requires=[
        "tiktoken",  # Token statistics (BPE encodings)
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'scriptfmt=scriptfmt.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
