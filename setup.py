from setuptools import setup

setup(
    name="straceit",
    version="0.1.0",
    packages=["straceit"],
    description="A dead simple per-descriptor I/O summary for strace logs",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    install_requires=[],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.11",
    keywords=["straceit", "strace", "io"],
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX :: Linux",
        "Intended Audience :: Developers",
    ],
)
