from typing import Any, Dict, Optional, Union, List

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def standard_response(
    data: Optional[Union[Dict[str, Any], List[Any], str, int, float, bool]] = None,
    code: int = 200,
    msg: str = "Success",
) -> Dict[str, Any]:
    """
    创建标准的响应格式

    参数:
        data: 响应数据，可以是任何类型
        code: 响应状态码，与HTTP状态码一致
        msg: 响应消息

    返回:
        Dict[str, Any]: 标准格式的响应对象
    """
    return {
        "code": code,
        "data": data,
        "msg": msg,
    }


def success_response(
    data: Optional[Union[Dict[str, Any], List[Any], str, int, float, bool]] = None,
    msg: str = "Success",
    code: int = 200,
) -> Dict[str, Any]:
    """
    创建成功响应

    参数:
        data: 响应数据
        msg: 成功消息
        code: 成功状态码，创建资源时为201

    返回:
        Dict[str, Any]: 标准格式的成功响应
    """
    return standard_response(data=data, code=code, msg=msg)


def error_response(
    msg: str = "Request failed",
    code: int = 400,
    data: Optional[Union[Dict[str, Any], List[Any], str]] = None,
) -> Dict[str, Any]:
    """
    创建错误响应

    参数:
        msg: 错误消息
        code: 错误状态码，默认400表示客户端错误
        data: 可选的错误详情数据

    返回:
        Dict[str, Any]: 标准格式的错误响应
    """
    return standard_response(data=data, code=code, msg=msg)


def json_response(body: Dict[str, Any], headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    """
    将标准响应包装为JSONResponse，HTTP状态码取自 body["code"]
    """
    return JSONResponse(
        content=jsonable_encoder(body),
        status_code=body["code"],
        headers=headers,
    )
