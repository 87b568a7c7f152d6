"""
接口层模块。

提供插件适配器、本地插件宿主和游戏事件 HTTP 接口。
"""
