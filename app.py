import os
import logging
import streamlit as st

# --- OTel & Observability Imports ---
from opentelemetry import trace
from opentelemetry._logs import set_logger_provider
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource

# --- OTel Logging Imports ---
from opentelemetry.sdk._logs import LoggerProvider, LoggingHandler
from opentelemetry.sdk._logs.export import BatchLogRecordProcessor
from opentelemetry.exporter.otlp.proto.grpc._log_exporter import OTLPLogExporter

# --- Prometheus Import ---
from prometheus_client import start_http_server

# --- Application Imports ---
from src.config import ShuffleConfig
from src.fsm import RunthroughState
from src.runthrough.presentation.state_provider import StreamlitStateProvider
from src.runthrough.presentation.viewmodel import RunthroughViewModel
from src.runthrough.presentation.views import catalog_view, components


# --- 1. Configure Observability ---
def configure_observability():
    """
    Sends Traces and Logs over OTLP when the OTEL env vars are set.
    Starts a background Prometheus server for Metrics.
    """
    endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
    headers = os.getenv("OTEL_EXPORTER_OTLP_HEADERS")

    if endpoint and headers:
        resource = Resource.create({"service.name": ShuffleConfig.SERVICE_NAME})

        # --- A. TRACING SETUP ---
        trace_provider = TracerProvider(resource=resource)
        otlp_trace_exporter = OTLPSpanExporter(endpoint=endpoint, headers=headers)
        trace_provider.add_span_processor(BatchSpanProcessor(otlp_trace_exporter))
        trace.set_tracer_provider(trace_provider)

        # --- B. LOGGING SETUP ---
        logger_provider = LoggerProvider(resource=resource)
        otlp_log_exporter = OTLPLogExporter(endpoint=endpoint, headers=headers)
        logger_provider.add_log_record_processor(BatchLogRecordProcessor(otlp_log_exporter))
        set_logger_provider(logger_provider)

        handler = LoggingHandler(level=logging.INFO, logger_provider=logger_provider)
        logging.getLogger().addHandler(handler)
    else:
        print("⚠️ Observability Warning: OTEL env vars not set. Telemetry stays local.")

    # --- C. METRICS SETUP (Prometheus) ---
    try:
        start_http_server(ShuffleConfig.METRICS_PORT)
        print(f"✅ Prometheus Metrics server started on port {ShuffleConfig.METRICS_PORT}")
    except OSError:
        print(f"⚠️ Prometheus port {ShuffleConfig.METRICS_PORT} already in use. Skipping.")


# --- 2. Bootstrap Application ---
if "observability_configured" not in st.session_state:
    logging.basicConfig(level=logging.INFO, format='%(asctime)s [%(levelname)s] %(message)s')

    configure_observability()
    st.session_state.observability_configured = True


def main():
    st.set_page_config(page_title="Runthrough", layout="wide")
    components.apply_styles()

    # --- 3. Wiring ---
    state_provider = StreamlitStateProvider()
    vm = RunthroughViewModel(state_provider)

    # --- 4. Sidebar ---
    db_path, seed, do_load, do_reset = components.render_sidebar(vm.db_path)

    if do_reset:
        vm.reset()
        st.rerun()

    if do_load:
        vm.load_catalog(db_path)
        st.rerun()

    if vm.error:
        st.error(vm.error)

    # --- 5. Main Router (FSM) ---
    state = vm.current_state
    st.title("🎧 Runthrough")

    if state == RunthroughState.IDLE:
        st.info("Load a GNUpod database to start.")

    elif state == RunthroughState.EMPTY_CATALOG:
        st.warning("The database has no tracks.")

    elif state in (RunthroughState.CATALOG_LOADED, RunthroughState.RANKED, RunthroughState.SAVED):
        if st.button("🔀 Shuffle", type="primary"):
            vm.shuffle(seed)
            st.rerun()

        if state == RunthroughState.SAVED:
            st.success(f"{ShuffleConfig.PLAYLIST_NAME} saved to {vm.db_path}")

        if state in (RunthroughState.RANKED, RunthroughState.SAVED):
            catalog_view.render_runthrough(vm)

        catalog_view.render_catalog(vm)


if __name__ == "__main__":
    main()
