"""
Setup configuration for the UML Code Generation Backend.
"""

from setuptools import setup, find_packages

setup(
    name="uml_codegen_backend",
    version="1.0.0",
    description="Generate SpringBoot JPA sources and SQL schemas from UML class diagrams",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "Django>=4.2",
        "djangorestframework>=3.14",
        "drf-spectacular>=0.27",
        "django-cors-headers>=4.0",
        "django-environ>=0.11",
        "whitenoise>=6.5",
        "Jinja2>=3.1",
        "pydantic>=2.0",
        "openai>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-django>=4.5",
            "factory-boy>=3.3",
            "httpx>=0.24",
        ],
    },
)
