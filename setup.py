from setuptools import setup

setup(
    name="median-window",
    version="0.1.0",
    description="Sliding window medians over streams of numbers",
    python_requires=">=3.8",
    py_modules=["track", "track_utils", "ui", "utils", "output"],
    packages=["datastructures", "windows"],
    install_requires=[
        "sortedcontainers",
        "numpy",
        "runstats",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["median-track=track:main"],
    },
)
