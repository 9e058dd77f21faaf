"""
Integration Tests - 集成测试

该目录包含跨模块的集成测试，从new_game()开始走完整的牌局流程。
"""
