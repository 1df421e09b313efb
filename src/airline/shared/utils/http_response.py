import json

from aws_lambda_powertools.event_handler import Response, content_types


def api_response(
    status_code: int, body: dict | list, headers: dict[str, str] | None = None
) -> Response:
    """API Gateway HTTP API 向けの JSON レスポンスを生成する"""
    return Response(
        status_code=status_code,
        content_type=content_types.APPLICATION_JSON,
        body=json.dumps(body, default=str),
        headers=headers,
    )


def error_response(
    status_code: int, message: str, details: list | None = None
) -> Response:
    """エラーレスポンスを生成する"""
    body: dict = {"error": message}
    if details is not None:
        body["details"] = details
    return api_response(status_code, body)
