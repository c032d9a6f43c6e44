"""Test-runner integration."""
