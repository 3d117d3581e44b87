"""
Fusion MCP - Fusion 360 文件通道 MCP 桥

Fusion 360 插件只能通过共享文件系统上的两个固定文件通信：
1. 命令文件 ~/Documents/fusion_command.txt：本进程原子写入 {command, parameters, timestamp}
2. 响应文件 ~/Documents/fusion_response.txt：Fusion 360 写入 {status, result, message, traceback}

启动：
    fusion-mcp-server
或
    python -m fusion_mcp.mcp_server.server
"""

__version__ = "0.7.80"
