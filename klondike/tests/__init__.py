"""
Tests Module - 测试框架

Test Categories:
    unit/: 单元测试 - 测试单个模块功能
    property/: 性质测试 - 用hypothesis验证牌局不变量
    integration/: 集成测试 - 测试模块间协作和完整流程
    common/: 测试辅助工具
"""
