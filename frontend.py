import streamlit as st
import json
import pandas as pd
from pathlib import Path

from courier.models import Order, FormatError
from courier.processing import OrderProcessor
from courier.config import ZONE_THRESHOLD

# ---- CONFIG ----
st.set_page_config(
    page_title="Delivery Order Processing",
    page_icon="🚚",
    layout="wide",
    initial_sidebar_state="expanded"
)

# File paths - adjust based on where you run streamlit from
DATA_DIR = Path("./data")
if not DATA_DIR.exists():
    DATA_DIR = Path("../data")  # Try parent directory

ORDERS_FILE = DATA_DIR / "orders.json"
RESULTS_FILE = DATA_DIR / "processing_results.json"

# ---- CUSTOM CSS ----
st.markdown("""
<style>
    .main-header {
        font-size: 2.5rem;
        font-weight: bold;
        color: #1f77b4;
        margin-bottom: 0.5rem;
    }
    .sub-header {
        font-size: 1.2rem;
        color: #666;
        margin-bottom: 2rem;
    }
</style>
""", unsafe_allow_html=True)

# ---- HELPER FUNCTIONS ----
def load_json_file(filepath):
    """Load JSON file"""
    try:
        if filepath.exists():
            with open(filepath, 'r') as f:
                return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        st.error(f"Error loading {filepath.name}: {str(e)}")
    return None

def orders_to_dataframe(orders):
    """Build a table of orders with their derived fields"""
    rows = []
    for position, order in enumerate(orders):
        row = order.to_dict()
        row["position"] = position
        row["zone"] = order.zone
        row["urgency"] = order.urgency
        rows.append(row)
    columns = ["position", "customer_name", "postal_code", "zone", "urgency", "priorities"]
    return pd.DataFrame(rows, columns=columns)

# ---- MAIN APP ----
st.markdown('<div class="main-header">🚚 Delivery Order Processing</div>', unsafe_allow_html=True)
st.markdown('<div class="sub-header">Filter, sort and group orders by zone and urgency</div>', unsafe_allow_html=True)

orders_data = load_json_file(ORDERS_FILE)

if not orders_data:
    st.error(f"⚠️ No orders found. Looking for: {ORDERS_FILE.absolute()}")
    st.stop()

orders = [Order.from_dict(o) for o in orders_data]

# ============ SIDEBAR ============
st.sidebar.title("📋 Data Status")
st.sidebar.metric("Orders", len(orders))

if RESULTS_FILE.exists():
    st.sidebar.success("✅ Saved processing results available")
else:
    st.sidebar.warning("⚠️ No saved processing results")
    st.sidebar.info("Run the processor first:\n```bash\npython -m courier.main\n```")

st.sidebar.markdown("---")
st.sidebar.markdown("### 🔍 Filters")

threshold = st.sidebar.number_input(
    "Zone threshold",
    value=ZONE_THRESHOLD,
    step=1,
    help="Only orders with a zone strictly greater than this are kept"
)

# ---- PROCESSING ----
try:
    all_df = orders_to_dataframe(orders)
    filtered = OrderProcessor.filter_by_zone_threshold(orders, int(threshold))
    sorted_orders = OrderProcessor.sort_by_zone_then_client(filtered)
    groups = OrderProcessor.group_by_urgency(orders)
except FormatError as e:
    st.error(f"❌ Malformed order data: {e}")
    st.stop()

dominant_urgency = OrderProcessor.select_dominant_urgency(groups)
stack = OrderProcessor.explode_dominant_group(groups)

# ---- METRICS OVERVIEW ----
col1, col2, col3, col4 = st.columns(4)

with col1:
    st.metric("Total Orders", len(orders))

with col2:
    st.metric("Above Threshold", len(filtered))

with col3:
    st.metric("Urgency Groups", len(groups))

with col4:
    st.metric("Dominant Urgency", "-" if dominant_urgency is None else dominant_urgency)

st.markdown("---")

# ---- SORTED ORDERS ----
st.subheader("🔃 Sorted Orders Above Threshold")
if not sorted_orders:
    st.warning("No orders above the current threshold")
else:
    collapsed = len(filtered) - len(sorted_orders)
    if collapsed:
        st.caption(f"{collapsed} order(s) sharing zone and customer were collapsed")
    st.dataframe(orders_to_dataframe(sorted_orders), hide_index=True, use_container_width=True)

# ---- URGENCY GROUPS ----
st.subheader("📦 Urgency Groups")
if groups:
    group_sizes = pd.DataFrame(
        {"urgency": [str(u) for u in groups], "orders": [len(g) for g in groups.values()]}
    ).set_index("urgency")
    st.bar_chart(group_sizes)

    selected_urgency = st.selectbox("Select urgency group", list(groups.keys()))
    st.dataframe(orders_to_dataframe(groups[selected_urgency]), hide_index=True, use_container_width=True)

# ---- DOMINANT GROUP ----
with st.expander("💥 Dominant Group Stack (top first)", expanded=True):
    if not stack:
        st.info("No orders to explode")
    else:
        st.dataframe(orders_to_dataframe(stack), hide_index=True, use_container_width=True)

# ---- ALL ORDERS ----
with st.expander("📋 All Orders", expanded=False):
    st.dataframe(all_df, hide_index=True, use_container_width=True)

# ---- SAVED RESULTS ----
with st.expander("📊 Saved Results Summary", expanded=False):
    results = load_json_file(RESULTS_FILE)
    if results:
        col1, col2 = st.columns(2)

        with col1:
            st.subheader("Summary")
            st.json(results.get("summary", {}))

        with col2:
            st.subheader("Issue Breakdown")
            st.json(results.get("issue_breakdown", {}))

        for issue in results.get("validation_issues", []):
            st.warning(issue)

# ---- FOOTER ----
st.markdown("---")
