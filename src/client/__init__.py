"""
Client layer: /read-file를 호출하는 쪽.

- controller: 폼 상태 머신 (Idle → FileSelected → Submitting → Success/Failed)
- api: httpx 기반 /read-file 호출
- cli: 터미널에서 파일 + 질문 전송
"""

from .api import ReadFileClient, ReadFileError
from .controller import (
    ClientRequestState,
    FormController,
    RequestStatus,
    SelectedFile,
    SubmitInProgressError,
)

__all__ = [
    "ReadFileClient",
    "ReadFileError",
    "FormController",
    "ClientRequestState",
    "RequestStatus",
    "SelectedFile",
    "SubmitInProgressError",
]
