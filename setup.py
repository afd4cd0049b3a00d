from setuptools import find_packages, setup


setup(
    name="srp_client",
    description="SRP-6a password-authenticated key exchange client",
    packages=find_packages(exclude=["tests", "tests.*"]),
    license="LGPLv3",
    python_requires=">=3.11",
    install_requires=[],
    entry_points={
        "console_scripts": [
            "srpclt = srp_client:main",
        ],
    },
)
