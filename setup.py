# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="filetree",
    version="0.1.0",
    description="Render a directory as an indented tree listing",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["filetree", "filetree.*"]),
    python_requires=">=3.9",
    install_requires=[
        "pyperclip",  # Clipboard sink (--copy)
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'filetree=filetree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
