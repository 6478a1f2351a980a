import gradio as gr
from functools import partial

from json_sql_explorer import config
from json_sql_explorer.handlers import (
    clear_history_handler,
    clear_query_handler,
    execute_query_handler,
    load_file_handler,
    load_sample_handler,
    paste_json_handler,
    pick_sample_query_handler,
    update_alias_handler,
    use_history_handler,
)
from json_sql_explorer.log_utils import setup_logging
from json_sql_explorer.samples import SAMPLE_LABELS, sample_queries

# --- UI Definition ---
with gr.Blocks(title="SQL Query Parser") as demo:
    gr.Markdown("# SQL Query Parser")
    gr.Markdown(
        "Explore and analyze your own JSON data using familiar SQL queries, "
        "with no setup or database required."
    )

    # State
    session_state = gr.State()

    with gr.Row():
        # Left Panel: Data
        with gr.Column(scale=1):
            gr.Markdown("### 1. Paste or upload your JSON data")

            gr.Markdown("Try sample JSON:")
            with gr.Row():
                sample_buttons = {name: gr.Button(label, size="sm") for name, label in SAMPLE_LABELS.items()}

            file_input = gr.File(label="Upload JSON File", file_types=[".json"])
            alias_input = gr.Textbox(label="Table Name", value=config.DEFAULT_ALIAS)
            json_input = gr.Textbox(
                label="Raw JSON",
                placeholder="Paste your JSON data here...",
                lines=10,
            )
            status_msg = gr.Textbox(label="Status", interactive=False)
            preview_table = gr.Dataframe(label=f"Data Preview (first {config.PREVIEW_ROWS} rows)", interactive=False)

        # Right Panel: Query
        with gr.Column(scale=1):
            gr.Markdown("### 2. Write an SQL query and click Execute Query")
            sample_query_selector = gr.Dropdown(
                label="Try sample SQL",
                choices=sample_queries(config.DEFAULT_ALIAS),
                value=None,
                interactive=True,
            )
            sql_input = gr.Textbox(
                label="SQL Query",
                placeholder="SELECT * FROM table WHERE ...",
                lines=5,
            )
            with gr.Row():
                execute_btn = gr.Button("Execute Query", variant="primary")
                clear_btn = gr.Button("Clear Query")

            gr.Markdown("### 3. Results")
            result_msg = gr.Textbox(label="Result", interactive=False)
            result_table = gr.Dataframe(label="Rows", interactive=False)
            result_json = gr.JSON(label="Rows as JSON")

            gr.Markdown("### 4. Query History")
            history_table = gr.Dataframe(headers=["Time", "Query"], label="History", interactive=False)
            with gr.Row():
                history_selector = gr.Dropdown(label="Past query", choices=[], value=None, interactive=False)
                use_btn = gr.Button("Use", size="sm")
                clear_history_btn = gr.Button("Clear History", size="sm")

    view_outputs = [
        session_state,
        alias_input,
        status_msg,
        preview_table,
        sample_query_selector,
        result_msg,
        result_table,
        result_json,
        history_table,
        history_selector,
    ]

    file_input.upload(
        fn=load_file_handler,
        inputs=[file_input, alias_input, session_state],
        outputs=[json_input] + view_outputs,
    )

    json_input.input(
        fn=paste_json_handler,
        inputs=[json_input, alias_input, session_state],
        outputs=view_outputs,
    )

    for name, button in sample_buttons.items():
        button.click(
            fn=partial(load_sample_handler, name),
            inputs=[session_state],
            outputs=[json_input] + view_outputs,
        )

    alias_input.submit(
        fn=update_alias_handler,
        inputs=[alias_input, session_state],
        outputs=view_outputs,
    )

    sample_query_selector.input(
        fn=pick_sample_query_handler,
        inputs=[sample_query_selector],
        outputs=[sql_input],
    )

    execute_btn.click(
        fn=execute_query_handler,
        inputs=[sql_input, alias_input, session_state],
        outputs=view_outputs,
    )

    clear_btn.click(
        fn=clear_query_handler,
        inputs=[session_state],
        outputs=[sql_input] + view_outputs,
    )

    use_btn.click(
        fn=use_history_handler,
        inputs=[history_selector, session_state],
        outputs=[sql_input] + view_outputs,
    )

    clear_history_btn.click(
        fn=clear_history_handler,
        inputs=[session_state],
        outputs=view_outputs,
    )

if __name__ == "__main__":
    setup_logging()
    demo.launch(server_name=config.SERVER_NAME, server_port=config.SERVER_PORT)
