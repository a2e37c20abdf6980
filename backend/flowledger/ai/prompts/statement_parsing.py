"""AI prompt for extracting transactions from pasted statement text."""

STATEMENT_PARSING_SYSTEM = "You are a data extraction specialist. Return only JSON."

STATEMENT_PARSING_USER = """Parse the following {context} and extract transaction information.
Return the data in this exact JSON format:

{{
  "transactions": [
    {{
      "date": "YYYY-MM-DD",
      "amount": number,
      "category": "string from provided categories",
      "note": "description from statement",
      "type": "expense" or "income" or "investment"
    }}
  ]
}}

Available categories:
- Income: {income_categories}
- Expenses: {expense_categories}
- Investments: {investment_categories}

Statement content:
{statement_text}

Important: Only return valid JSON, no additional text."""
