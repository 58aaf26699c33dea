from typing import Any, Dict, List, Type

from pydantic import BaseModel, ValidationError


def validate_model(schema_cls: Type[BaseModel], data: Dict[str, Any]) -> List[str]:
    """
    按请求模型校验数据

    参数:
        schema_cls: pydantic 请求模型
        data: 待校验的原始数据

    返回:
        List[str]: 校验失败的字段名（嵌套字段用"."连接），校验通过时为空列表
    """
    try:
        schema_cls.model_validate(data)
    except ValidationError as e:
        fields = []
        for error in e.errors():
            name = ".".join(str(part) for part in error["loc"])
            if name not in fields:
                fields.append(name)
        return fields
    return []
