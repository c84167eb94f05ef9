from setuptools import setup, find_packages

setup(
    name="nimrev_scoring",
    version="0.1.0",
    description="Composite threat, alpha and viral scoring engine for blockchain addresses",
    packages=find_packages(include=["nimrev", "nimrev.*"]),
    python_requires=">=3.9",
    install_requires=[
        "aiohttp",
        "backoff",
        "pydantic>=2.0",
        "python-dotenv"
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
            "pytest-mock"
        ]
    }
)
