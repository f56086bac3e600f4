# Models package init
"""
Social Media API Backend: ORM Models
======================================

    - account.py:  Account  → `account` table
    - message.py:  Message  → `message` table

Account 1 ─── * Message, linked by message.posted_by. The link is a plain
indexed integer column: posted_by is checked against account.id only when a
message is created, and there is no cascade.
"""
