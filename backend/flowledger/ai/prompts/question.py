QUESTION_SYSTEM = "You are a financial advisor helping with expense tracking."

QUESTION_USER = "Context: I have {transaction_count} transactions in my expense tracker. {question}"
