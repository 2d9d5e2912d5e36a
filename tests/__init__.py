"""Tests for the Wyze HomeKit accessories."""
