"""
The MODEL layer contains pure data structures and the evaluation logic.
It has NO knowledge of the GUI (Qt).
"""
