"""
Mail Agent: prompt -> LLM -> structured email -> SMTP
"""
