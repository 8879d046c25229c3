from setuptools import setup, find_packages

setup(
    name="answer_grader",
    version="0.1.0",
    packages=find_packages(include=["answer_grader", "answer_grader.*", "webapp", "webapp.*"]),
    py_modules=["run_app"],
    install_requires=[
        "Flask>=3.0",
        "Flask-SQLAlchemy>=3.1",
        "SQLAlchemy>=2.0",
        "Flask-Cors>=4.0",
        "python-dotenv>=1.0.1",
        "requests>=2.31.0",
        "Levenshtein>=0.25",
    ],
    extras_require={
        "test": ["pytest>=7.4"],
    },
    entry_points={
        "console_scripts": ["answer-grader=run_app:main"],
    },
    python_requires=">=3.8",
    author="Answer Grader Team",
    description="Answer-key extraction, verification and fuzzy grading of OCR-transcribed exam sheets",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
