# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="tree4ai",
    version="0.1.0",
    description="LLM-friendly project tree: relevant file names of a project as compact context",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["tree4ai*"]),
    package_data={"tree4ai.interface.locales": ["*.json"]},
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'tree4ai=tree4ai.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
