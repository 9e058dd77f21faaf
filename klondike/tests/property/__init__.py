"""
Property Tests - 性质测试

该目录包含基于hypothesis的性质测试，重点测试纸牌守恒、牌库回收顺序和开局牌型。
"""
