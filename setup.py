# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="file-analyzer",
    version="0.1.0",
    description="Directory size analyzer with bundler-style metafile output",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["file_analyzer*"]),  # src layout, no top-level __init__
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'file-analyzer=file_analyzer.main:main',  # CLI entry point
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
