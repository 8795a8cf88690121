from setuptools import setup, find_packages

setup(
    name="resume_field_extractor",
    version="0.1.0",
    packages=find_packages(include=["resume_extractor", "resume_extractor.*", "config"]),
    install_requires=[
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
        "python-dotenv>=0.19.0",
        "pytesseract>=0.3.8",
        "pdf2image>=1.16.0",
        "Pillow>=9.0.0",
        "chardet>=4.0.0",
        "tqdm>=4.60.0",
        "psutil>=5.8.0",
        "numpy>=1.19.5",
        "click>=8.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
)
