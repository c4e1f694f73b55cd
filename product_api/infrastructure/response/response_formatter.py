from typing import Any, Dict, Optional, Union, List


def standard_response(
    data: Optional[Union[Dict[str, Any], List[Any], str, int, float, bool]] = None,
    code: int = 200,
    msg: str = "OK",
) -> Dict[str, Any]:
    """
    创建标准的响应格式

    参数:
        data: 响应数据，可以是任何类型
        code: 响应状态码，默认200表示成功
        msg: 响应消息

    返回:
        Dict[str, Any]: {"code": ..., "data": ..., "msg": ...}
    """
    return {
        "code": code,
        "data": data,
        "msg": msg,
    }


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
    """
    return standard_response(data=data, code=code, msg=msg)


def not_found_response(entity: str = "Resource") -> Dict[str, Any]:
    """创建资源未找到响应"""
    return error_response(msg=f"{entity} not found", code=404)
