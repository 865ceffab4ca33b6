"""Liftout scoring engine.

Sub-modules:
- culture_compatibility – four-factor team / company fit assessment
- dimension_breakdown   – six-dimension display breakdown
- culture_signals       – culture risk & strength detection
- integration_plan      – templated 90-day integration plan
- health_scoring        – integration health & retention risk
- early_warnings        – tracker warning rules
"""
