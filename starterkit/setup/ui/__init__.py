"""Terminal UI helpers: Rich output primitives and Questionary prompts."""
