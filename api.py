"""SciJournal Digest API - 期刊文章聚合接口."""

import logging
from pathlib import Path
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from scijournal import __version__
from scijournal.S1_aggregate import Aggregator, FeedError, check_feed
from scijournal.S3_dedup import HeldArticles
from scijournal.browse import find_group, paginate
from scijournal.config import Settings, load_settings
from scijournal.models import ArticleGroup, ArticlePage, FeedSource, FeedTestResult, FeedType
from scijournal.registry import (
    JournalExistsError,
    JournalNotFoundError,
    JournalValidationError,
    SourceRegistry,
)

# ─────────────────────────────────────────────────────────────
# 日志配置
# ─────────────────────────────────────────────────────────────

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def setup_api_logging(log_dir: Path) -> Path:
    """Configure logging for API process."""
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "api.log"

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    # File handler
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(formatter)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    return log_file


settings: Settings = load_settings()
_log_file = setup_api_logging(settings.log_dir)
logger = logging.getLogger(__name__)


app = FastAPI(
    title="SciJournal Digest API",
    description="Academic journal RSS/Atom aggregation",
    version=__version__,
)

# 允许跨域 (浏览器前端调用)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# 全局单例
_registry = SourceRegistry(settings.sources_file)
_aggregator = Aggregator(_registry.list, settings=settings)


def get_registry() -> SourceRegistry:
    return _registry


def get_aggregator() -> Aggregator:
    return _aggregator


def get_settings() -> Settings:
    return settings


# ─────────────────────────────────────────────────────────────
# 请求模型
# ─────────────────────────────────────────────────────────────

class FeedTestRequest(BaseModel):
    """Feed 测试请求"""
    url: str = ""


class JournalRequest(BaseModel):
    """期刊新增/修改请求 (字段缺失时返回 400, 而非 422)"""
    journal_name: str = Field("", alias="journalName")
    url: str = ""
    type: FeedType = FeedType.STANDARD

    class Config:
        populate_by_name = True

    def to_source(self) -> FeedSource:
        return FeedSource(journal_name=self.journal_name, url=self.url, type=self.type)


class JournalDeleteRequest(BaseModel):
    """期刊删除请求"""
    journal_name: str = Field("", alias="journalName")

    class Config:
        populate_by_name = True


class MergeRequest(BaseModel):
    """客户端保留的文章 (按期刊分组)"""
    held: list[ArticleGroup] = []


class MessageResponse(BaseModel):
    message: str


# ─────────────────────────────────────────────────────────────
# API 端点
# ─────────────────────────────────────────────────────────────

@app.get("/api/health")
def health_check():
    """健康检查"""
    return {
        "service": "SciJournal Digest API",
        "version": __version__,
        "status": "ok",
    }


@app.get("/api/rss", response_model=list[ArticleGroup])
def get_rss(aggregator: Aggregator = Depends(get_aggregator)):
    """
    获取全部期刊的文章 (按期刊分组)

    命中缓存直接返回, 否则顺序抓取所有源.
    """
    try:
        return aggregator.get_groups()
    except Exception as e:
        logger.error(f"Error in RSS handler: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Failed to fetch RSS feeds"})


@app.post("/api/rss/merge", response_model=list[ArticleGroup])
def merge_rss(
    body: MergeRequest,
    aggregator: Aggregator = Depends(get_aggregator),
):
    """
    把最新结果合并进客户端保留的文章

    新文章 (按 link) 置顶, 去重后按日期倒序, 每个期刊最多保留 6 篇.
    只在 held 里出现的期刊原样保留, 排在最后.
    """
    try:
        fresh = aggregator.get_groups()
    except Exception as e:
        logger.error(f"Error in RSS merge handler: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Failed to fetch RSS feeds"})

    held = HeldArticles()
    held.update(body.held)
    held.update(fresh)

    order = [g.journal_name for g in fresh]
    order += [g.journal_name for g in body.held if g.journal_name not in order]
    return held.as_groups(order)


@app.get("/api/rss/{journal_name}", response_model=ArticlePage)
def get_journal_page(
    journal_name: str,
    q: str = Query("", description="标题/摘要关键词"),
    page: int = Query(1, ge=1),
    per_page: Optional[int] = Query(None, ge=1, le=50),
    aggregator: Aggregator = Depends(get_aggregator),
    current: Settings = Depends(get_settings),
):
    """单个期刊的分页 + 搜索"""
    group = find_group(aggregator.get_groups(), journal_name)
    if group is None:
        raise HTTPException(status_code=404, detail="Journal not found")
    return paginate(group, page=page, per_page=per_page or current.page_size, query=q)


@app.post("/api/admin/test-feed", response_model=FeedTestResult)
def run_feed_test(
    body: FeedTestRequest,
    current: Settings = Depends(get_settings),
):
    """测试一个 RSS 地址能否解析"""
    if not body.url.strip():
        return JSONResponse(status_code=400, content={"success": False, "message": "URL is required"})
    try:
        return check_feed(body.url.strip(), settings=current)
    except FeedError as e:
        logger.warning(f"Feed test error for {body.url}: {e.message}")
        return JSONResponse(status_code=400, content={"success": False, "message": e.message})


@app.get("/api/admin/journals", response_model=list[FeedSource])
def list_journals(registry: SourceRegistry = Depends(get_registry)):
    """获取全部期刊"""
    return registry.list()


@app.post("/api/admin/journals", response_model=MessageResponse)
def add_journal(
    body: JournalRequest,
    registry: SourceRegistry = Depends(get_registry),
    aggregator: Aggregator = Depends(get_aggregator),
):
    """新增期刊"""
    try:
        registry.add(body.to_source())
    except JournalValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except JournalExistsError as e:
        raise HTTPException(status_code=409, detail=str(e))
    aggregator.cache.clear()
    return MessageResponse(message="Journal added successfully")


@app.put("/api/admin/journals", response_model=MessageResponse)
def update_journal(
    body: JournalRequest,
    registry: SourceRegistry = Depends(get_registry),
    aggregator: Aggregator = Depends(get_aggregator),
):
    """修改期刊 (按名称匹配)"""
    try:
        registry.update(body.to_source())
    except JournalValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except JournalNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    aggregator.cache.clear()
    return MessageResponse(message="Journal updated successfully")


@app.delete("/api/admin/journals", response_model=MessageResponse)
def delete_journal(
    body: JournalDeleteRequest,
    registry: SourceRegistry = Depends(get_registry),
    aggregator: Aggregator = Depends(get_aggregator),
):
    """删除期刊"""
    try:
        registry.delete(body.journal_name)
    except JournalValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except JournalNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    aggregator.cache.clear()
    return MessageResponse(message="Journal deleted successfully")


# ─────────────────────────────────────────────────────────────
# 启动
# ─────────────────────────────────────────────────────────────

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8080)
