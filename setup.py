from setuptools import setup, find_packages

setup(
    name="autotest-core",
    version="0.1.0",
    description="Geração e execução de testes de UI guiadas por IA - providers, scripts Playwright e merge",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "autotest_core": ["prompts/*.txt"],
    },
    python_requires=">=3.10",
    install_requires=[
        "httpx>=0.25.0",
        "python-dotenv>=1.0.0",
        "structlog>=23.0.0",
        "openai>=1.0.0,<3",
        "anthropic>=0.18.0,<1",
        "playwright>=1.40.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "autotest=autotest_core.cli:main",
        ],
    },
)
