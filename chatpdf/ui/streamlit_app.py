"""
Streamlit chat page.

Run with: streamlit run chatpdf/ui/streamlit_app.py
The API base URL comes from CHATPDF_API_BASE.
"""

import os

import streamlit as st
from dotenv import load_dotenv

from chatpdf.ui.api_client import ChatPDFClient
from chatpdf.ui.chat_state import ChatState

load_dotenv()

# =========================================================
# CONFIG
# =========================================================
API_BASE = os.getenv("CHATPDF_API_BASE", "http://localhost:5000")

st.set_page_config(page_title="ChatPDF", layout="wide")

if "chat_state" not in st.session_state:
    st.session_state.chat_state = ChatState()
if "client" not in st.session_state:
    st.session_state.client = ChatPDFClient(API_BASE)

state: ChatState = st.session_state.chat_state
client: ChatPDFClient = st.session_state.client

# =========================================================
# SIDEBAR
# =========================================================
st.sidebar.title("📄 ChatPDF")

# A fresh key after each upload resets the picker so the file is not re-selected.
uploaded = st.sidebar.file_uploader("Choose a PDF", type=["pdf"], key=state.uploader_key)
if uploaded is not None and (state.pending_file is None or state.pending_file.name != uploaded.name):
    state.select_file(uploaded.name, uploaded.getvalue())

if st.sidebar.button("Upload & Index", disabled=state.is_uploading, use_container_width=True):
    with st.spinner("Indexing document..."):
        state.upload(client)
    st.rerun()

if state.error:
    st.sidebar.error(state.error)
if state.pdf_name:
    st.sidebar.caption(f"Current document: {state.pdf_name}")

# =========================================================
# MAIN CHAT
# =========================================================
st.title("Chat with your PDF")

for message in state.messages:
    with st.chat_message(message.role):
        st.markdown(message.content)

question = st.chat_input("Ask me anything about your PDF...", disabled=state.is_asking)

if question:
    with st.chat_message("user"):
        st.markdown(question)
    with st.chat_message("assistant"):
        with st.spinner("Thinking..."):
            reply = state.ask(client, question)
        if reply is not None:
            st.markdown(reply.content)
