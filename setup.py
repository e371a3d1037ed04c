from setuptools import setup

setup(
    name="pattern_filters",
    version="0.1.0",
    description="Random X% feature filters for pattern-recognition pipelines",
    packages=[
        "pattern_filters",
        "pattern_filters.algorithms",
        "pattern_filters.filters",
        "pattern_filters.utils",
    ],
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "torch",
        "PyYAML",
        "toml; python_version < '3.11'",
    ],
    extras_require={
        "test": ["pytest"],
    },
    zip_safe=False,
)
