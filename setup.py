"""
VideoRankKit - 키워드 기반 유튜브 동영상 검색/랭킹 모듈
쇼츠를 제외하고 최신성/조회수/구독자 수로 랭킹하는 YouTube Data API 기반 검색 레이어
"""
from setuptools import setup, find_packages

setup(
    name="videorankkit",
    version="0.1.0",
    description="YouTube keyword search with shorts filtering, weighted ranking and result caching",
    author="VideoRank Team",
    author_email="",
    packages=find_packages(include=["videorankkit", "videorankkit.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0.0",
        "python-dotenv>=1.0.0",
        "httpx>=0.24.0",
        "cachetools>=5.3.0",
    ],
    extras_require={
        "server": [
            "fastapi>=0.100.0",
        ],
        "dev": [
            "fastapi>=0.100.0",
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "anyio>=3.7.0",
        ]
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
