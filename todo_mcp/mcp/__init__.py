"""
MCP (Model Context Protocol) Server Package

This package implements the tool server that exposes todo management
operations to AI agents.

- Every tool call passes through parameter admission before reaching a backend
- Admission errors are returned to the caller verbatim
"""
