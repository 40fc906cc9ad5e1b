from setuptools import setup, find_packages

setup(
    name="namehack",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "requests",
        "dnspython",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "namehack = namehack.cli:main",
        ],
    },
    python_requires=">=3.8",
    author="exfil0",
    description="Domain name combinator and DNS availability checker",
    license="MIT",
    keywords="domain names generator availability dns hacks",
    url="https://github.com/exfil0/namehack",
)
