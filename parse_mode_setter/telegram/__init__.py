"""Telegram Bot API client, request payloads and response models."""
