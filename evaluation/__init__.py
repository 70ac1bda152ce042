"""Bot-vs-bot evaluation tools"""
