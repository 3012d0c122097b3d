import streamlit as st

# MUST be the first Streamlit command
st.set_page_config(layout="wide", page_title="Résumé Builder")

import json

import config
from errors import InvalidInput
from llm_client import get_llm_client
from pipeline import apply_suggestions, generate_resume, grade_resume, render_resume, resume_from_profile
from sample_data import SAMPLE_RESUME

config.configure_logging()


@st.cache_resource
def load_llm_client():
    """One client per Streamlit server process; None means heuristics only."""
    return get_llm_client()


# Initialize session state variables
if "resume_json" not in st.session_state:
    st.session_state.resume_json = json.dumps(SAMPLE_RESUME, indent=2)
if "document_html" not in st.session_state:
    st.session_state.document_html = ""
if "grade_report" not in st.session_state:
    st.session_state.grade_report = None
if "action_plan" not in st.session_state:
    st.session_state.action_plan = []
if "pending_resume_json" in st.session_state:
    st.session_state.resume_json = st.session_state.pop("pending_resume_json")

client = load_llm_client()

st.title("📄 Résumé Builder")
if client is None:
    st.info("💡 No language model configured: rendering, grading and suggestions use the built-in heuristics.")
else:
    st.info(f"🤖 Using **{config.get_provider()}** model `{config.get_model_for_provider()}` with heuristic fallback.")


with st.sidebar:
    st.subheader("👤 Stored profile")
    profile_file = st.file_uploader("Student profile (JSON)", type=["json"])
    if st.button("Load profile", disabled=profile_file is None):
        try:
            profile = json.loads(profile_file.getvalue())
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            st.error(f"❌ Profile JSON is invalid: {e}")
        else:
            draft = resume_from_profile(profile, SAMPLE_RESUME)
            st.session_state.pending_resume_json = json.dumps(draft, indent=2)
            st.session_state.document_html = render_resume(draft)
            st.session_state.grade_report = None
            st.session_state.action_plan = []
            st.rerun()


def current_resume():
    """Parse the editor contents; None (with an error shown) when invalid."""
    try:
        data = json.loads(st.session_state.resume_json)
    except json.JSONDecodeError as e:
        st.error(f"❌ Résumé JSON is invalid: {e}")
        return None
    return data


col_editor, col_output = st.columns([1, 1])

with col_editor:
    st.subheader("✏️ Résumé data")
    st.text_area("Résumé JSON", key="resume_json", height=520)

    col_render, col_generate, col_grade = st.columns(3)
    with col_render:
        if st.button("Render"):
            data = current_resume()
            if data is not None:
                st.session_state.document_html = render_resume(data)
    with col_generate:
        if st.button("Generate with AI"):
            data = current_resume()
            if data is not None:
                try:
                    with st.spinner("Generating résumé..."):
                        st.session_state.document_html = generate_resume(data, client, timeout=config.get_timeout())
                except InvalidInput as e:
                    st.error(f"❌ {e}")
    with col_grade:
        if st.button("Grade"):
            data = current_resume()
            if data is not None:
                try:
                    with st.spinner("Grading résumé..."):
                        st.session_state.grade_report = grade_resume(
                            data, st.session_state.document_html or None, client, timeout=config.get_timeout()
                        )
                except InvalidInput as e:
                    st.error(f"❌ {e}")

with col_output:
    st.subheader("🖨️ Document")
    if st.session_state.document_html:
        st.html(st.session_state.document_html)
        st.download_button(
            "Download HTML",
            data=st.session_state.document_html,
            file_name="resume.html",
            mime="text/html",
        )
    else:
        st.caption("Render or generate the résumé to preview it here.")

report = st.session_state.grade_report
if report:
    st.divider()
    st.subheader("📊 Grade")
    cols = st.columns(5)
    labels = [
        ("Overall", "overallScore"),
        ("ATS", "atsScore"),
        ("Content", "contentScore"),
        ("Design", "designScore"),
        ("Completeness", "completenessScore"),
    ]
    for col, (label, key) in zip(cols, labels):
        col.metric(label, report[key])

    chosen = []
    for i, s in enumerate(report["suggestions"]):
        text = f"**{s['priority']}** · {s['type']}: {s['detail']}"
        if s.get("example"):
            text += f"  \n_e.g._ {s['example']}"
        if st.checkbox(text, value=True, key=f"suggestion_{i}"):
            chosen.append(s)

    if st.button("Apply selected suggestions", type="primary"):
        data = current_resume()
        if data is not None:
            with st.spinner("Applying suggestions..."):
                improved, plan = apply_suggestions(data, chosen, client, timeout=config.get_timeout())
            # the editor widget already exists this run; hand the value to the next one
            st.session_state.pending_resume_json = json.dumps(improved, indent=2)
            st.session_state.document_html = render_resume(improved)
            st.session_state.action_plan = plan
            st.rerun()

if st.session_state.action_plan:
    st.divider()
    st.subheader("✅ Action plan")
    for item in st.session_state.action_plan:
        line = f"- **{item['priority']}**: {item['task']}"
        if item.get("example"):
            line += f" (e.g. {item['example']})"
        st.markdown(line)
