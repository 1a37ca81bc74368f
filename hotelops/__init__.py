"""
HotelOps - 酒店运营管理后端
客人档案、房间库存、预订、客房服务、入住退房与仪表盘统计
"""
__version__ = "1.0.0"
