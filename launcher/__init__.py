"""
🚀 Launcher
Command-line shell around the genetic solver
"""
