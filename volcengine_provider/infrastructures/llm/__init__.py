# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description: OpenAI-compatible LLM infrastructure for VolcEngine.
