from setuptools import setup, find_packages

setup(
    name="motopass_seo",
    version="1.0.0",
    packages=find_packages(where=".", exclude=["tests", "tests.*"]),
    package_dir={"": "."},
    install_requires=[
        "fastapi",
        "uvicorn",
        "pydantic>=2.4",
        "python-dotenv",
        "flask",
        "flask-cors"
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
            "httpx"
        ]
    }
)
