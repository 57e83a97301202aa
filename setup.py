# setup.py
from setuptools import setup, find_packages

setup(
    name="webfont_audit",
    version="0.1.0",
    description="Аудит font-display: шрифты, скрывающие текст во время загрузки",
    packages=find_packages(exclude=["tests", "tests.*"]),  # найдёт папку webfont_audit
    package_data={"webfont_audit": ["templates/*.j2"]},
    install_requires=[
        "click>=8.1",
        "pydantic>=2.5",
        "PyYAML>=6.0",
        "Jinja2>=3.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "webfont-audit=webfont_audit.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
