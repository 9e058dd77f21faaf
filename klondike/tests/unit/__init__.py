"""
Unit Tests - 单元测试

该目录包含核心模块和应用层的单元测试。
"""
