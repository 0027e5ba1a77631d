# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description: DomainModel 基类（统一 pydantic 配置）

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    # 允许字段名包含 model_*（如 model_id），避免 pydantic protected namespace 告警
    model_config = ConfigDict(
        from_attributes=True,
        protected_namespaces=(),
        populate_by_name=True,
    )
