"""AI prompt for freeform spending analysis."""

ANALYSIS_SYSTEM = "You are a helpful financial analyst."

ANALYSIS_USER = """You are a financial assistant. Analyze the following transaction data and provide insights:

Transactions:
{transactions_text}

Available Categories:
- Income: {income_categories}
- Expenses: {expense_categories}
- Investments: {investment_categories}

Please provide:
1. Summary of spending patterns
2. Suggestions for budget optimization
3. Any anomalies or unusual transactions

Format your response in clear, concise paragraphs."""
