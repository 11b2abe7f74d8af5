"""
Core pure functions for the client.

This package contains I/O-free functions for response decoding, error
mapping and sync wrappers.
"""

from .responses import (
    parse_json,
    decode_response,
    decode_payload,
    extract_status_message,
    map_status_code_to_exception,
    parse_http_error_response,
    map_request_exception,
)

from .sync import (
    detect_event_loop_state,
    run_in_thread_pool,
)

__all__ = [
    # Response functions
    "parse_json",
    "decode_response",
    "decode_payload",
    "extract_status_message",
    "map_status_code_to_exception",
    "parse_http_error_response",
    "map_request_exception",
    # Sync functions
    "detect_event_loop_state",
    "run_in_thread_pool",
]
