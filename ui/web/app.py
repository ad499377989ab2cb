"""Streamlit demo for indexing a folder and searching it."""
from __future__ import annotations

from pathlib import Path

import streamlit as st

from application.use_cases.ingest_paths import ingest_paths
from application.use_cases.search import search
from infrastructure.config import ContainerConfig, build_default_container

container = build_default_container(ContainerConfig.from_env())
st.set_page_config(page_title="TF-IDF Search Demo")
st.title("TF-IDF Search Demo")

st.header("Index")
index_form = st.form("index")
folder = index_form.text_input("Folder", value=".")
index_submit = index_form.form_submit_button("Index folder")
if index_submit:
    root = Path(folder).expanduser()
    if not root.is_dir():
        st.error(f"Not a directory: {root}")
    else:
        corpus, report = ingest_paths(
            [root],
            tokenizer=container.tokenizer,
            extractors=container.extractors,
            default_extractor=container.default_extractor,
        )
        st.session_state["corpus"] = corpus
        st.success(f"Indexed {report.indexed} of {report.total} documents")
        for error in report.errors:
            st.warning(f"{error.path}: {error.reason}")

st.header("Search")
search_query = st.text_input("Query", value="")
top_n = st.number_input("Top N", min_value=1, value=container.top_n, step=1)
if st.button("Search"):
    corpus = st.session_state.get("corpus")
    if corpus is None:
        st.info("Index a folder first.")
    else:
        results = search(search_query, corpus=corpus, tokenizer=container.tokenizer, top_n=int(top_n))
        if not results:
            st.write("Couldn't find any relevant documents")
        for result in results:
            st.write({"document_id": result.document_id, "score": round(result.score, 4)})
