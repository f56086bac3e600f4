# Schemas package init
"""
Social Media API Backend: Pydantic Request/Response Schemas
=============================================================

    - account.py:  AccountRequest, AccountResponse
    - message.py:  MessageRequest, MessageResponse
    - common.py:   ErrorResponse, HealthResponse

JSON keys are camelCase (postedBy, messageText, postedAt) through field
aliases; Python code uses the snake_case field names.
"""
