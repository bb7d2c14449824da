# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .settings import AppConfig, PaginationConfig, SecurityConfig, ServerConfig, load_config

__all__ = ["AppConfig", "PaginationConfig", "SecurityConfig", "ServerConfig", "load_config"]
