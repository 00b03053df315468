class PromptService:
    @staticmethod
    def get_questions_generate_prompt(
        extracted_text: str,
        question_type: str,
        question_count: int,
    ) -> str:
        """Renders the instruction sent to the LLM for one generation call.

        The extracted text is embedded verbatim between triple quotes so the
        model can tell the content apart from the instructions around it.
        """
        return f"""
Generate exactly {question_count} questions of type {question_type} based on the following content:

Content:
\"\"\"
{extracted_text}
\"\"\"

Instructions:
- Generate {question_count} questions.
- Question type: {question_type} (MCQ, Short, Broad)
- For MCQ, provide 4 distinct options (A, B, C, D) and specify the correct answer letter (e.g., "A").
- Ensure all generated questions are directly answerable from the provided content.
- Format your response strictly as a raw JSON array of objects without any markdown or triple backticks.
- Each object in the array should have keys: "question", "options" (array, empty for Short/Broad), and "answer" (string or letter).

Now, generate the questions:
"""
