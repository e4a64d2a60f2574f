# -*- coding: utf-8 -*-
"""
wordfinder.api パッケージ

FastAPI による HTTP の入口です（`uvicorn wordfinder.api.local_api:app`）。
"""
