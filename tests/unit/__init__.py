"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic; temporary files only via tmp_path.
"""
