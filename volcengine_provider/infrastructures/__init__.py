# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description: Config, logging and LLM adapters (infrastructure only).
