# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description: Provider settings and request/response contracts (no I/O).
