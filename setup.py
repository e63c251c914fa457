from setuptools import setup, find_packages

setup(
    name="siphasher",
    version="1.0.2",
    description="SipHash-2-4, SipHash-1-3 and their 128-bit variants in pure Python, with a streaming hashlib-style API and byte-exact compatibility with the reference implementation.",
    long_description=open("Readme.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    install_requires=[],
    extras_require={
        "dataframes": ["pandas"],
        "arrow": ["pyarrow"],
        "polars": ["polars"],
        "test": ["pytest", "hypothesis"],
    },
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
    ],
    zip_safe=False,
)
