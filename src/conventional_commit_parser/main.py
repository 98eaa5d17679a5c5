"""
HTTP service exposing the commit message parser.

Endpoints accept `{"message": "..."}` and return the parsed result as JSON.
Parse errors map to 422 responses carrying the classified error kind.
"""

import uvicorn
import logging
from typing import List, Literal, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from . import __version__
from .commit import CommitType, Footer, SeparatorKind, format_conventional_commit
from .config import get_settings
from .errors import ErrorFormatter, ParseError
from .parser import parse, parse_body, parse_footers, parse_summary

logger = logging.getLogger(__name__)


app = FastAPI(title="Conventional Commit Parser")


class MessageRequest(BaseModel):
    """Raw commit message text"""
    message: str


class FooterModel(BaseModel):
    token: str = Field(pattern=r"^(BREAKING CHANGE|[^\s:-]+(-[^\s:-]+)*)$")
    content: str
    separator: Literal["colon_space", "space_hash", "colon_newline"] = "colon_space"


class CommitModel(BaseModel):
    """Commit fields to render back into message text"""
    commit_type: str = Field(pattern=r"^[^\s():!]+$")
    summary: str = Field(pattern=r"^[^\r\n]+$")
    scope: Optional[str] = Field(None, pattern=r"^[^\s()]*$")
    body: Optional[str] = None
    footers: List[FooterModel] = []
    is_breaking_change: bool = False


@app.exception_handler(ParseError)
async def parse_error_handler(request: Request, error: ParseError):
    """Turn a ParseError into a 422 response."""
    logger.info(f"Rejected message on {request.url.path}: {ErrorFormatter.format_error_concise(error)}")

    content = {
        "kind": error.kind.value,
        "message": error.message,
        "line": error.line,
        "column": error.column,
        "expected": error.expected,
    }
    if get_settings().include_error_details:
        content["details"] = ErrorFormatter.format_error_detailed(error)

    return JSONResponse(status_code=422, content=content)


@app.post("/parse")
async def parse_message(request: MessageRequest):
    """Parse a complete commit message."""
    return parse(request.message).to_dict()


@app.post("/parse/summary")
async def parse_summary_line(request: MessageRequest):
    """Parse a summary line only."""
    return parse_summary(request.message).to_dict()


@app.post("/parse/body")
async def parse_body_text(request: MessageRequest):
    """Parse a body only."""
    return {"body": parse_body(request.message)}


@app.post("/parse/footers")
async def parse_footer_block(request: MessageRequest):
    """Parse a footer block only."""
    return {"footers": [footer.to_dict() for footer in parse_footers(request.message)]}


@app.post("/format")
async def format_commit(commit: CommitModel):
    """Render commit fields as a conventional commit message."""
    footers = tuple(
        Footer(
            token=footer.token,
            content=footer.content,
            separator=SeparatorKind[footer.separator.upper()]
        )
        for footer in commit.footers
    )
    message = format_conventional_commit(
        commit_type=CommitType.from_token(commit.commit_type),
        summary=commit.summary,
        scope=commit.scope,
        body=commit.body,
        footers=footers,
        breaking=commit.is_breaking_change
    )
    return {"message": message}


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "conventional-commit-parser"
    }


@app.get("/")
async def root():
    """Root endpoint with service info"""
    return {
        "name": "Conventional Commit Parser",
        "description": "Parses commit messages following the Conventional Commits specification",
        "version": __version__,
        "commit_types": [commit_type.value for commit_type in CommitType],
        "endpoints": ["/parse", "/parse/summary", "/parse/body", "/parse/footers", "/format"]
    }


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
