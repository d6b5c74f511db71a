# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Framework-agnostic CORS policy: configuration, origin matching, and header emission."""

from flycors.cors.config import CorsConfig
from flycors.cors.http import DEFAULT_METHODS, HttpMethod
from flycors.cors.origin import (
    AllowedOrigins,
    AnyOrigin,
    ExactOrigin,
    OriginMatcher,
    OriginPredicate,
    origin_matcher,
)
from flycors.cors.policy import Cors, cors
from flycors.cors.ports import CorsMiddlewareFn, CorsRequest, CorsResponse, Proceed

__all__ = [
    "DEFAULT_METHODS",
    "AllowedOrigins",
    "AnyOrigin",
    "Cors",
    "CorsConfig",
    "CorsMiddlewareFn",
    "CorsRequest",
    "CorsResponse",
    "ExactOrigin",
    "HttpMethod",
    "OriginMatcher",
    "OriginPredicate",
    "Proceed",
    "cors",
    "origin_matcher",
]
