#!/usr/bin/env python3
"""
Flask Web Application for the Build Summarizer
Provides a REST API endpoint that summarizes uploaded build traces.
"""

from flask import Flask, request, jsonify
from werkzeug.utils import secure_filename
import os
import tempfile
import ijson
from build_summarizer import BuildSummarizer, MalformedTraceError, SummaryConfig

app = Flask(__name__)
app.json.sort_keys = False
app.config['MAX_CONTENT_LENGTH'] = 500 * 1024 * 1024
app.config['UPLOAD_FOLDER'] = tempfile.gettempdir()

ALLOWED_EXTENSIONS = {'json'}

def allowed_file(filename):
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS


@app.route('/api/summarize', methods=['POST'])
def summarize_api():
    """
    API endpoint to summarize a build trace file.
    Accepts: multipart/form-data with fields:
      - 'file': broccoli-viz trace JSON file
      - 'cutoff': fraction of total time a plugin needs to be listed (optional, default: 0.05)
    Returns: JSON summary document
    """
    if 'file' not in request.files:
        return jsonify({'error': 'No file provided'}), 400

    file = request.files['file']

    if not file.filename:
        return jsonify({'error': 'No file selected'}), 400

    if not allowed_file(file.filename):
        return jsonify({'error': 'Invalid file type. Only JSON files are allowed.'}), 400

    try:
        cutoff = float(request.form.get('cutoff', SummaryConfig.DEFAULT_CUTOFF))
        summarizer = BuildSummarizer(cutoff=cutoff)
    except ValueError as e:
        return jsonify({'error': f'Invalid cutoff: {e}'}), 400

    filename = secure_filename(file.filename)
    filepath = os.path.join(app.config['UPLOAD_FOLDER'], filename)
    file.save(filepath)

    try:
        summary = summarizer.process_trace_file(filepath)
    except (MalformedTraceError, ijson.JSONError) as e:
        return jsonify({'error': f'Malformed trace: {e}'}), 400
    except Exception as e:
        return jsonify({'error': str(e)}), 500
    finally:
        os.remove(filepath)

    return jsonify(summary)


if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=5001)
