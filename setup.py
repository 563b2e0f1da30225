from setuptools import find_packages, setup

with open("README.md", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pyfastnoise",
    version="0.0.1",
    author="Boris Gailleton",
    author_email="boris.gailleton@univ-rennes.fr",
    description="Deterministic Perlin and fractal noise with numpy and Taichi rasterization",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["pyfastnoise", "pyfastnoise.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering",
        "Topic :: Multimedia :: Graphics",
    ],
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
        "click>=7.0",
        "pillow>=8.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "black",
            "flake8",
        ],
        "taichi": [
            "taichi>=1.4.0",
        ],
    },
    keywords="procedural noise perlin fractal octaves hashing taichi",
    entry_points={
        "console_scripts": [
            "pfn-noise=pyfastnoise.cli.noise_commands:noise",
        ],
    },
)
