"""Application layer: report engine, formatters, statistics, orchestration."""
