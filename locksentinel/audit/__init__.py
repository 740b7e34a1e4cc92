"""Audit engine: classify expectations against a lock model."""

from locksentinel.audit.engine import AuditEngine, query, run
from locksentinel.audit.models import AuditResult, AuditRun, AuditStatus, Counters

__all__ = ["AuditEngine", "AuditResult", "AuditRun", "AuditStatus", "Counters", "query", "run"]
