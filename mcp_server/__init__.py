"""
MCP 传输层：把工具目录与命令派发暴露为 MCP stdio server。
"""
