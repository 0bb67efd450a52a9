import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.responses import PlainTextResponse

from file_summarizer.services.summarizer import Failure, SummarizationClient
from file_summarizer.services.txt_validator import Rejected, UploadedFile, validate_upload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["summarize"])


def get_summarization_client(request: Request) -> SummarizationClient:
    # 앱 시작 시(lifespan) 한 번 만들어 둔 클라이언트
    return request.app.state.summarization_client


def server_error(detail: str) -> PlainTextResponse:
    return PlainTextResponse(f"Error processing file: {detail}", status_code=500)


@router.post("/summarize", response_class=PlainTextResponse)
async def summarize_txt_file(
    file: Optional[UploadFile] = File(None),
    client: SummarizationClient = Depends(get_summarization_client),
):
    try:
        upload = None
        if file is not None:
            upload = UploadedFile(name=file.filename, raw=await file.read())

        outcome = validate_upload(upload)
        if isinstance(outcome, Rejected):
            logger.info("upload rejected: %s", outcome.reason.name)
            return PlainTextResponse(outcome.reason.message, status_code=400)

        result = await client.summarize(outcome.text)
        if isinstance(result, Failure):
            return server_error(result.detail)

        return PlainTextResponse(result.text)
    except Exception as e:
        logger.exception("Error processing file")
        return server_error(str(e))
