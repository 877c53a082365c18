"""
Setup script for the grade posting policy package.
"""

from setuptools import find_packages, setup

setup(
    name="gradeposting",
    version='0.1',
    description="Grade posting policies for courses and assignments",
    python_requires=">=3.8",
    install_requires=[
        "Django>=4.2",
        "django-model-utils",
        "django-simple-history",
        "edx-opaque-keys",
        "path",
        "pymemcache",
    ],
    extras_require={
        "test": [
            "ddt",
            "factory_boy",
            "freezegun",
            "pytest",
            "pytest-django",
        ],
    },
    packages=find_packages(include=["gradeposting", "gradeposting.*"]),
)
