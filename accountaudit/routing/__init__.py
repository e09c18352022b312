"""Audit routing — dispatches audit records to all configured sinks.

Sinks are pluggable targets: the log sink (CloudWatch inside Lambda), a
local JSON-lines file, or any custom sink implementing the ``AuditSink``
protocol.  No record is silently dropped.
"""
