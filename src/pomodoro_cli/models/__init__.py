"""Pomodoro CLI domain models."""
