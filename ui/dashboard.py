# ui/dashboard.py
import sys, os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
import streamlit as st
import requests
from parsers.upload import MAX_FILE_SIZE, ALLOWED_FILE_TYPES, format_file_size

# -------------------- CONFIG --------------------
API_URL = os.getenv("API_URL", "http://localhost:3001")
st.set_page_config(page_title="RoleFit", page_icon="🎯", layout="wide")
st.title("🎯 RoleFit: CV vs Job Description")

st.markdown(
    "Upload your CV and the job description (PDF, up to "
    f"{format_file_size(MAX_FILE_SIZE)} each) to get a compatibility score, "
    "a short summary, your strengths, the gaps and concrete suggestions."
)

# -------------------- SESSION STATE --------------------
if "last_analysis" not in st.session_state:
    st.session_state.last_analysis = None

# Bumped on reset so the file uploaders come back empty
if "upload_key" not in st.session_state:
    st.session_state.upload_key = 0


def check_pdf(uploaded):
    """Same checks the API applies; returns an error message or None."""
    if uploaded.type not in ALLOWED_FILE_TYPES:
        return "Please upload only PDF files"
    if uploaded.size > MAX_FILE_SIZE:
        return f"File size must be less than {format_file_size(MAX_FILE_SIZE)}"
    return None


def render_result(result: dict):
    with st.container(border=True):
        st.markdown("### 📊 Analysis Results")

        score = result["score"]
        left, right = st.columns([4, 1])
        left.markdown("**Compatibility Score**")
        right.markdown(f"## {score}/100")
        # progress bar wants an int in 0..100
        st.progress(int(max(0, min(100, score))))

        st.markdown("#### Summary")
        st.write(result["summary"])

        col1, col2, col3 = st.columns(3)
        with col1:
            st.markdown("#### ✅ Strengths")
            st.success(result["strengths"])
        with col2:
            st.markdown("#### ⚠️ Gaps")
            st.error(result["gaps"])
        with col3:
            st.markdown("#### 💡 Suggestions")
            st.info(result["suggestions"])


# -------------------- UPLOAD --------------------
col_cv, col_jd = st.columns(2)
with col_cv:
    cv_file = st.file_uploader("📄 Your CV / Resume", type=["pdf"], key=f"cv_{st.session_state.upload_key}")
    if cv_file:
        st.caption(f"{cv_file.name} · {format_file_size(cv_file.size)}")
with col_jd:
    jd_file = st.file_uploader("🧾 Job Description", type=["pdf"], key=f"jd_{st.session_state.upload_key}")
    if jd_file:
        st.caption(f"{jd_file.name} · {format_file_size(jd_file.size)}")

errors = [msg for msg in (check_pdf(f) for f in (cv_file, jd_file) if f) if msg]
for msg in errors:
    st.error(f"❌ {msg}")

if st.button("🔍 Analyze", disabled=not (cv_file and jd_file) or bool(errors)):
    files = {
        "cv": (cv_file.name, cv_file.getvalue(), "application/pdf"),
        "jd": (jd_file.name, jd_file.getvalue(), "application/pdf"),
    }
    with st.spinner("⏳ Analyzing your CV against the job description..."):
        try:
            r = requests.post(f"{API_URL}/analyze", files=files, timeout=180)
        except requests.exceptions.RequestException as e:
            st.error(f"❌ Connection error: {e}")
            st.stop()

    try:
        st.session_state.last_analysis = r.json()
    except ValueError:
        st.session_state.last_analysis = {"ok": False, "message": f"Analysis failed: {r.text}", "result": None}

analysis = st.session_state.get("last_analysis")
if analysis:
    if analysis.get("ok") and analysis.get("result"):
        st.success(f"✅ {analysis['message']}")
        render_result(analysis["result"])
    else:
        st.error(f"❌ {analysis.get('message') or 'Analysis failed. Please try again.'}")

    if st.button("↩️ Start new analysis"):
        st.session_state.last_analysis = None
        st.session_state.upload_key += 1
        st.rerun()
