import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from file_summarizer.core.config import APP_HOST, APP_PORT, CORS_ORIGINS, LOG_LEVEL, load_provider_config
from file_summarizer.routers.summarize import get_summarization_client, router as summarize_router
from file_summarizer.services.openai_client import close_client
from file_summarizer.services.summarizer import SummarizationClient

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(name)s %(levelname)s %(message)s")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 잘못된 설정값은 요청 시점이 아니라 기동 시점에 실패한다
    app.state.summarization_client = SummarizationClient(load_provider_config())
    yield
    await close_client()


app = FastAPI(title="File Summarizer API", version="0.1.0", lifespan=lifespan)

# 프론트엔드(업로드 화면)에서 호출
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class HealthResponse(BaseModel):
    status: str
    service: str
    summarization: str


@app.get("/api/health", response_model=HealthResponse)
def health_check(client: SummarizationClient = Depends(get_summarization_client)):
    return HealthResponse(
        status="ok",
        service="file-summarizer",
        summarization="configured" if client.configured else "not_configured",
    )


# router 등록
app.include_router(summarize_router)  # .txt 업로드 + 요약


if __name__ == "__main__":
    uvicorn.run("file_summarizer.main:app", host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())
