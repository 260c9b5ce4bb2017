"""Single-page viewer served at GET /. Renders /sequence with Mermaid."""

INDEX_HTML = """<!doctype html>
<html>
<head>
<meta charset="utf-8"/>
<title>Raft Simulation (Mock)</title>
<script src="https://cdn.jsdelivr.net/npm/mermaid/dist/mermaid.min.js"></script>
<script>mermaid.initialize({ startOnLoad: false });</script>
<style>
  body { font-family: system-ui, -apple-system, Segoe UI, Roboto, Helvetica, Arial, sans-serif; margin: 16px; }
  .toolbar { margin: 8px 0 16px; display: flex; gap: 8px; align-items: center; }
  .mermaid { border: 1px solid #ccc; padding: 12px; border-radius: 6px; }
  button { padding: 8px 12px; cursor: pointer; }
  #count { margin-left: auto; opacity: .7; }
</style>
</head>
<body>
<h2>Raft Simulation (Mock) - Sequence Diagram</h2>
<div class="toolbar">
  <button id="btn-sim">Run Simulation</button>
  <button id="btn-reset">Reset</button>
  <a href="/events" target="_blank">View JSON</a>
  <a href="/nodes" target="_blank">Nodes</a>
  <span id="count"></span>
</div>
<div id="seq" class="mermaid"></div>

<script>
async function loadSeq() {
  const text = await (await fetch('/sequence')).text();
  const el = document.getElementById('seq');
  try {
    const out = await mermaid.render('seq_' + Date.now(), text);
    el.innerHTML = out.svg;
    if (out.bindFunctions) out.bindFunctions(el);
  } catch (e) {
    // Mermaid failed: show the raw diagram text instead
    el.textContent = text;
  }
  try {
    const events = await (await fetch('/events')).json();
    document.getElementById('count').textContent = 'Events: ' + events.length;
  } catch (e) {}
}
async function post(url) { await fetch(url, { method: 'POST' }); }
document.getElementById('btn-sim').onclick = async () => { await post('/simulate'); await loadSeq(); };
document.getElementById('btn-reset').onclick = async () => { await post('/reset'); await loadSeq(); };
loadSeq();
setInterval(loadSeq, 5000);
</script>
</body>
</html>
"""
